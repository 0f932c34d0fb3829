"""
Shared media backend library code.

This package holds the TMDb metadata client and its collaborators. Application
layers (routes, loaders, scripts) import from `media_backend`; nothing in here
imports from them.
"""
