from ..models import ContentEntry
from .json_parser import parse_content_file

__all__ = ["ContentEntry", "parse_content_file"]
