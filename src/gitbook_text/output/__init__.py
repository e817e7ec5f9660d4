"""Writers for link lists and downloaded documents."""

from gitbook_text.output.links import write_links
from gitbook_text.output.store import DocumentStore
from gitbook_text.utils.url_utils import url_to_filename

__all__ = [
    "DocumentStore",
    "url_to_filename",
    "write_links",
]
