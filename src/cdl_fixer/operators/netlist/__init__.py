from .sections import SectionDefaultsOperator, HeaderBannerOperator
from .case_convert import CaseNormalizeOperator
from .geometry import GeometryRecoveryOperator
from .pininfo import PinInfoMergeOperator
from .fix_cdl import CdlFixOperator, fix_cdl_text
