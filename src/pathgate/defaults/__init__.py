"""Configuration resources shipped with pathgate."""
