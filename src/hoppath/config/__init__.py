"""Configuration: settings models, hoppath.toml lookup, logging setup."""
