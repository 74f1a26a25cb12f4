"""
Tag reconciliation for mods.
"""
from typing import Iterable


def reconcile_tags(
    current: Iterable[str],
    add: Iterable[str],
    delete: Iterable[str],
) -> list[str]:
    """
    Compute a mod's new tag list from add/delete requests.
    
    Deletes run first and remove only the first occurrence of each tag.
    Adds then append tags that are not already present, in request order.
    A tag removed by this call's deletes is not added back, so asking to
    both add and delete an existing tag deletes it. Untouched tags keep
    their position.
    
    Args:
        current: Existing tags
        add: Tags to add
        delete: Tags to delete
        
    Returns:
        New tag list (``current`` is not modified)
    
    Example:
        >>> reconcile_tags(["a", "b"], add=["c", "a"], delete=["b"])
        ['a', 'c']
    """
    tags = list(current)
    deleted = set()
    for tag in delete:
        if tag in tags:
            tags.remove(tag)
            deleted.add(tag)
    for tag in add:
        if tag not in tags and tag not in deleted:
            tags.append(tag)
    return tags
