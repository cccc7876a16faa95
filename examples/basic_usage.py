#!/usr/bin/env python3
"""
Basic TreeDefLib usage.

Describes an org chart held in two dicts as a ParentedTreeDef, then walks
and queries it.
"""

from pathlib import Path
import sys

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treedeflib import ParentedTreeDef, breadth_first, depth_first, query

REPORTS = {
    "ceo": ["cto", "cfo"],
    "cto": ["platform", "apps"],
    "platform": ["sre"],
    "cfo": ["payroll"],
}
MANAGER = {report: boss for boss, reports in REPORTS.items() for report in reports}

org = ParentedTreeDef.of(lambda n: REPORTS.get(n, []), MANAGER.get)


def main():
    print("Breadth-first:", ", ".join(breadth_first(org, "ceo")))
    print("Depth-first:  ", ", ".join(depth_first(org, "ceo")))
    print()
    print("Chain of command for sre:", " -> ".join(query.to_root(org, "sre")))
    print("Path of apps:", query.path(org, "apps"))
    print("Who do sre and apps share?", query.lowest_common_ancestor(org, "sre", "apps"))
    print("Who do sre and payroll share?", query.lowest_common_ancestor(org, "sre", "payroll"))
    print()
    print(query.to_string(org, "ceo", indent="  "), end="")


if __name__ == "__main__":
    main()
