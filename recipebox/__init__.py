"""Recipebox: recipe sharing API with likes and reviews."""
