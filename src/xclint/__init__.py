"""xclint - Target linter for Xcode project generation.

xclint inspects the description of a single build target and reports
structural and semantic problems before project files are generated.
"""

__version__ = "0.1.0"
__author__ = "xclint contributors"
__description__ = "Target linter for Xcode project generation"

from xclint.config import XclintConfig
from xclint.linting import TargetLinter
from xclint.models import IssueSeverity, LintingIssue, Target

__all__ = [
    "__version__",
    "__author__",
    "__description__",
    "XclintConfig",
    "TargetLinter",
    "IssueSeverity",
    "LintingIssue",
    "Target",
]
