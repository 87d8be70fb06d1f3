"""Test fixtures and data builders."""
