#!/usr/bin/env python3
"""
Setup script for tinycli that takes its metadata from pyproject.toml.
"""

import sys

from setuptools import find_packages, setup

# Read the pyproject.toml to get the package metadata
try:
    import tomllib

    with open("pyproject.toml", "rb") as f:
        pyproject_data = tomllib.load(f)

    poetry = pyproject_data["tool"]["poetry"]
    name = poetry["name"]
    version = poetry["version"]
    description = poetry["description"]
    authors = poetry["authors"]
    license_text = poetry["license"]

    def requirements(table: dict) -> list[str]:
        reqs = []
        for dep, version_spec in table.items():
            if dep == "python":
                continue
            if isinstance(version_spec, str):
                reqs.append(f"{dep}{version_spec}")
            else:
                reqs.append(dep)
        return reqs

    install_requires = requirements(poetry["dependencies"])
    test_requires = requirements(
        poetry.get("group", {}).get("dev", {}).get("dependencies", {})
    )

    # Console scripts
    scripts = poetry.get("scripts", {})
    console_scripts = [f"{script} = {target}" for script, target in scripts.items()]

    # Get packages
    packages = find_packages(where="src")
    package_dir = {"": "src"}

    setup(
        name=name,
        version=version,
        description=description,
        author=authors[0] if isinstance(authors, list) else authors,
        license=license_text,
        packages=packages,
        package_dir=package_dir,
        install_requires=install_requires,
        extras_require={"test": test_requires},
        entry_points={"console_scripts": console_scripts},
        python_requires=">=3.11,<4.0",
        include_package_data=True,
        zip_safe=False,
    )

except Exception as e:
    print(f"Error reading pyproject.toml: {e}")
    sys.exit(1)
