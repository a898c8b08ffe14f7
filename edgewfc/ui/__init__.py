from .main_window import MainWindow
from .grid_canvas import GridCanvas

__all__ = ['MainWindow', 'GridCanvas']
