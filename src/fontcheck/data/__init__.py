from .loader import load_run_config, load_table_dump, load_yaml_typed, open_table_dump

__all__ = ["load_run_config", "load_table_dump", "load_yaml_typed", "open_table_dump"]
