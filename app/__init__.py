"""Church management backend: directory and notification delivery.

The file exists so ``app`` resolves as a regular package rather than a
namespace package that could pick up unrelated modules from site-packages.
"""
