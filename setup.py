#!/usr/bin/env python
"""infset -- installer script"""

from setuptools import setup, find_packages

params = {}
params["name"] = "infset"
params["version"] = "1.0"
params["description"] = "Sets that are either a finite union of elements " \
                        "or the complement of one"
params["packages"] = find_packages(exclude=["test", "test.*"])
params["scripts"] = ["bin/infset_filter.py"]
params["python_requires"] = ">=3.7"
params["install_requires"] = ["tables"]
params["extras_require"] = {"test": ["pandas"]}

setup(**params)
