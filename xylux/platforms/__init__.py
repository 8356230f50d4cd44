"""Namespace for platform-specific helpers; it holds no modules yet."""