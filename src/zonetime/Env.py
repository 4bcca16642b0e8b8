#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import os
from pathlib import Path

from .Obj import Obj


class Env(Obj):
    """Process environment - configuration lookup for zonetime.

    Config keys are resolved from the ZONETIME_<KEY> environment variable,
    then etc/zonetime/config.props under the working directory, then the
    caller's default.
    """

    _instance = None

    POD = "zonetime"

    def __init__(self):
        self._propsCache = {}

    @staticmethod
    def cur():
        if Env._instance is None:
            Env._instance = Env()
        return Env._instance

    def runtime(self):
        return "py"

    def work_dir(self):
        """Get working directory used to locate etc/ files."""
        return Path(os.getcwd())

    def vars(self):
        """Get environment variables as a dict copy."""
        return dict(os.environ)

    def config(self, key, def_val=None):
        """Get configuration value.

        Args:
            key: Config key such as 'defaultZone'
            def_val: Default value if not found

        Returns:
            Config value or default
        """
        env_key = f"ZONETIME_{key.upper()}"
        val = os.environ.get(env_key)
        if val is not None and val.strip():
            return val.strip()

        props = self.props(f"etc/{Env.POD}/config.props")
        val = props.get(key)
        if val is not None:
            return val

        return def_val

    def props(self, rel_path):
        """Load props file relative to the working directory with caching.

        Missing files yield an empty dict.
        """
        path = (self.work_dir() / rel_path).resolve()
        cache_key = str(path)
        if cache_key in self._propsCache:
            return self._propsCache[cache_key]

        props = {}
        if path.is_file():
            props = Env.read_props(path.read_text(encoding="utf-8"))
        self._propsCache[cache_key] = props
        return props

    def reload(self):
        """Drop cached props so the next lookup re-reads from disk."""
        self._propsCache = {}

    @staticmethod
    def read_props(text):
        """Parse props format: 'name=value' lines with '#' and '//' comments.

        A trailing backslash continues the value on the next line.
        """
        props = {}
        pending = None
        for raw in text.splitlines():
            line = raw.strip()
            if pending is not None:
                name, val = pending
                cont = line.endswith("\\")
                val += line[:-1] if cont else line
                if cont:
                    pending = (name, val)
                    continue
                props[name] = val
                pending = None
                continue

            if not line or line.startswith("#") or line.startswith("//"):
                continue
            eq = line.find("=")
            if eq < 0:
                continue
            name = line[:eq].strip()
            val = line[eq + 1:].strip()
            if val.endswith("\\"):
                pending = (name, val[:-1])
                continue
            props[name] = val
        if pending is not None:
            props[pending[0]] = pending[1]
        return props

    def to_str(self):
        return f"Env({self.runtime()})"
