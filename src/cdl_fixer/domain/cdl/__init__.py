from .si_units import SI_PREFIXES, format_si, parse_si
from .lines import LineStore, split_lines
from .attributes import attribute_pattern, extract_attribute, extract_value
from .geometry import effective_width, recover_line, solve_rectangle
from .sections import (
    CDL_SECTION_DEFAULTS,
    SectionDefault,
    ensure_sections,
    generator_banner,
    netlist_banner,
    prepend_banner,
)
from .case import CDL_CASE_REPLACEMENTS, lowercase_keys, normalize_case
from .modules import DescriptorParser, ParserState, load_module_descriptor, parse_module_descriptor
from .pininfo import PININFO_TOKEN, SUBCKT_TOKEN, build_pininfo_line, merge_pininfo, subckt_name
