from tailwindsmart.sorting.sorter import group_by_category, priority, sort_classes, sort_tokens

__all__ = ["group_by_category", "priority", "sort_classes", "sort_tokens"]
