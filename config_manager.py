"""Configuration management for the Peaceful Queens tooling.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize enumeration settings, the search time limit, export options and
the persisted solution counts observed per board size.

File format (high-level)
------------------------
- experiment_settings: board sizes, repeated timing runs, output directory.
- timeout_settings: optional wall-clock limit for one search.
- export_settings: console printing and SVG export options for ``solve``.
- known_counts: mapping N -> number of solutions from completed searches.

All methods return Python native types; the class does not validate semantics
beyond presence of keys to keep responsibilities minimal.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist configuration and known solution counts.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file.

        Returns
        -------
        dict
            Root configuration object.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or use the default config.json template"
            )

        with open(self.config_path, 'r') as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get_experiment_settings(self):
        """Return enumeration settings (board sizes, runs, output dir)."""
        return self.config.get("experiment_settings", {})

    def get_timeout_settings(self):
        """Return the search time limit settings."""
        return self.config.get("timeout_settings", {})

    def get_export_settings(self):
        """Return console/SVG export settings."""
        return self.config.get("export_settings", {})

    def get_known_counts(self):
        """Return persisted solution counts keyed by board size (as int)."""
        raw = self.config.get("known_counts", {})
        counts = {}
        for key, value in raw.items():
            try:
                counts[int(key)] = int(value)
            except (TypeError, ValueError):
                continue
        return counts

    def save_known_counts(self, counts):
        """Merge ``{N: count}`` into the stored counts and persist them.

        Parameters
        ----------
        counts : dict
            Mapping of board size to the solution count of a finished search.
        """
        stored = self.config.setdefault("known_counts", {})
        for n, count in counts.items():
            stored[str(n)] = int(count)
        self.save_config()
        print(f"Solution counts saved to {self.config_path}")

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()
