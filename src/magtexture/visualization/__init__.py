from .slice import render_slice, save_slice

__all__ = ["render_slice", "save_slice"]
