# ==============================================
# TOPIC 3: CODEC
# ==============================================
#
# Round-trip of table-level and column-level metadata through
# TOML text (or the equivalent nested dict).
#
# Modules:
# --------
# - toml_codec.py  → meta_to_toml / toml_to_meta and dict variants
#
# ==============================================

from .toml_codec import meta_to_dict, meta_to_toml, dict_to_meta, toml_to_meta

__all__ = ["meta_to_dict", "meta_to_toml", "dict_to_meta", "toml_to_meta"]
