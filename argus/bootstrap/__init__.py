"""Wiring of the workflow services.

The API layer asks this package for ready-made services; only here do
the application ports meet their stub or Supabase adapters.
"""
