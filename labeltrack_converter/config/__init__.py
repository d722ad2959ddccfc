"""Configuration for the Label Track Converter."""
