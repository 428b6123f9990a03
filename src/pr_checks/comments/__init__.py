from .reconciler import (
    COMMENT_HEADING,
    COMMENT_MARKER,
    CommentReconciler,
    build_comment_body,
    filter_sections,
    find_tracked_comment,
)
from .sources import RESULTS_FILENAME, derive_sections, results_file_section

__all__ = [
    "COMMENT_HEADING",
    "COMMENT_MARKER",
    "CommentReconciler",
    "build_comment_body",
    "filter_sections",
    "find_tracked_comment",
    "RESULTS_FILENAME",
    "derive_sections",
    "results_file_section",
]
