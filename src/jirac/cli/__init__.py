"""CLI package for jirac."""
