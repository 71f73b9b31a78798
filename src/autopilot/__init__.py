"""Headless driver for the torpedo engine: environment, scripted policies, batch runner."""
