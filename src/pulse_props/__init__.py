from .component import (
	hydrate_props,
	hydrate_state,
	json_unmarshal,
	unmarshal_props,
	unmarshal_state,
)
from .convert import convert_record, s_to_map, to_map
from .decode import Decoder, DecoderConfig, from_map, unmarshal_struct
from .env import DEFAULT_TAG_NAME, ENV_PULSE_PROPS_TAG, default_tag_name
from .errors import (
	DecodeError,
	DecoderConfigError,
	ErrorCode,
	FieldError,
	HostJSONError,
	PropsError,
	UnsupportedTypeError,
)
from .host import (
	HostObject,
	HostRuntime,
	LocalHost,
	current_host,
	host_json_parse,
	is_host_null,
	is_live_host_object,
	use_host,
)
from .html import (
	DANGEROUSLY_SET_INNER_HTML,
	HTML_KEY,
	dangerously_set_inner_html,
	dangerously_set_inner_html_func,
)
from .schema import FieldDescriptor, FieldKind, is_record, record_schema
from .sets import ClassNames, DataSet, PropSet
from .tags import OMITEMPTY, SKIP, Tag, parse_tag, prop
from .version import __version__
from .zero import is_empty, zero_record, zero_value

__all__ = [
	"ClassNames",
	"DANGEROUSLY_SET_INNER_HTML",
	"DEFAULT_TAG_NAME",
	"DataSet",
	"DecodeError",
	"Decoder",
	"DecoderConfig",
	"DecoderConfigError",
	"ENV_PULSE_PROPS_TAG",
	"ErrorCode",
	"FieldDescriptor",
	"FieldError",
	"FieldKind",
	"HTML_KEY",
	"HostJSONError",
	"HostObject",
	"HostRuntime",
	"LocalHost",
	"OMITEMPTY",
	"PropSet",
	"PropsError",
	"SKIP",
	"Tag",
	"UnsupportedTypeError",
	"__version__",
	"convert_record",
	"current_host",
	"dangerously_set_inner_html",
	"dangerously_set_inner_html_func",
	"default_tag_name",
	"from_map",
	"host_json_parse",
	"hydrate_props",
	"hydrate_state",
	"is_empty",
	"is_host_null",
	"is_live_host_object",
	"is_record",
	"json_unmarshal",
	"parse_tag",
	"prop",
	"record_schema",
	"s_to_map",
	"to_map",
	"unmarshal_props",
	"unmarshal_state",
	"unmarshal_struct",
	"use_host",
	"zero_record",
	"zero_value",
]
