"""
Name matching for directory entries.
"""


def name_matches(entry_name: str, query_name: str) -> bool:
    """
    Decide whether an entry's base name satisfies a query name.

    Matching is exact and case-sensitive. An empty query name matches
    every entry.

    Args:
        entry_name: Base name of the directory entry
        query_name: Name requested by the query

    Returns:
        True if the entry should be reported
    """
    return not query_name or query_name == entry_name
