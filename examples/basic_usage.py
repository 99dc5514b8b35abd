#!/usr/bin/env python3
"""
Example: Basic usage of git-authorship as a Python library
"""

from git_authorship import analyze

# Attribute Python and Rust lines in a repository
report = analyze("/path/to/repo", ["py", "rs"], sort_mode="exact")

for entry in report.entries:
    print(f"{entry.author}: {entry.lines:,} lines ({entry.percent:.1f}%)")

print(f"Analysis complete: {report.total_lines:,} lines from "
      f"{len(report.files_processed)} files")
