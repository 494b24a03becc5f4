from gqlform.logger import get_logger

__author__ = """gqlform contributors"""
__version__ = "0.1.0"

log = get_logger("gqlform")

from gqlform.errors import FormBuildError  # noqa: E402
from gqlform.form import FormSpec, build_form_spec, extract_initial_values  # noqa: E402
from gqlform.tools.string import humanize  # noqa: E402

__all__ = [
    "FormBuildError",
    "FormSpec",
    "build_form_spec",
    "extract_initial_values",
    "humanize",
    "log",
]
