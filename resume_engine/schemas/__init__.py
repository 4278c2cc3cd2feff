from .profile import (
    ContactDetails,
    ParseErrorKind,
    ParseFailure,
    ProjectRecord,
    RawTextMeta,
    ResumeProfile,
    SectionBody,
)

__all__ = [
    "SectionBody",
    "ProjectRecord",
    "ContactDetails",
    "RawTextMeta",
    "ResumeProfile",
    "ParseErrorKind",
    "ParseFailure",
]
