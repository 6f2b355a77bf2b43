# src/trishape/config/__init__.py
# Defaults live in drawing_rules.py and config.yaml, see loader.py for reading them
