from menu.utilities.config import DATA_DIR, RECIPES_FILE

# Centralized paths for data files (single source of truth)
__all__ = ['DATA_DIR', 'RECIPES_FILE']
