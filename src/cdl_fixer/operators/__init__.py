from .netlist import (
    SectionDefaultsOperator,
    HeaderBannerOperator,
    CaseNormalizeOperator,
    GeometryRecoveryOperator,
    PinInfoMergeOperator,
    CdlFixOperator,
    fix_cdl_text,
)

__all__ = [
    "SectionDefaultsOperator",
    "HeaderBannerOperator",
    "CaseNormalizeOperator",
    "GeometryRecoveryOperator",
    "PinInfoMergeOperator",
    "CdlFixOperator",
    "fix_cdl_text",
]
