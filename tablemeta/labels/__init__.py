# ==============================================
# TOPIC 2: LABELS
# ==============================================
#
# Human-readable column labels stored as column-level metadata.
#
# Modules:
# --------
# - accessor.py  → label / set_label and their bulk variants
#
# ==============================================

from .accessor import label, set_label, labels, set_labels, delete_label

__all__ = ["label", "set_label", "labels", "set_labels", "delete_label"]
