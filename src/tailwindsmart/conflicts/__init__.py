from tailwindsmart.conflicts.detector import bucket_by_variants, detect_conflicts

__all__ = ["bucket_by_variants", "detect_conflicts"]
