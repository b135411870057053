"""Workflows with their typed attributes, numbered steps and runs."""