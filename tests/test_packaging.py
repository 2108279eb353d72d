"""
Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
import tomllib

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def _dependencies():
    with open(os.path.join(ROOT, "pyproject.toml"), "rb") as f:
        project = tomllib.load(f)["project"]
    return {dep.split(">")[0].split("<")[0].split(";")[0].strip(): dep for dep in project["dependencies"]}


def test_mcp_is_held_to_the_1x_server_api():
    assert _dependencies()["mcp"] == "mcp>=1.20,<2"


def test_uvloop_is_required_on_every_platform():
    assert ";" not in _dependencies()["uvloop"]
