"""Placeholder sub-package; it holds no calculator modules."""