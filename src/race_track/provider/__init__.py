from .parser import CaseParseError, CaseProvider

__all__ = ["CaseProvider", "CaseParseError"]
