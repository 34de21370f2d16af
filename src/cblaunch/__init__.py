# Copyright (c) 2025 Mahmood Khordoo
#
# This software is licensed under the MIT License.
# See the LICENSE file in the root directory for details.

"""
CBLAUNCH - interactive launcher for claude-bridge.

A Python CLI tool that reads locally stored API keys, models and defaults,
lets the user pick a key and a model (quick start, numbered list or fuzzy
search) and launches ``claude-bridge`` with the resolved credentials.
"""

__version__ = "0.1.0"
