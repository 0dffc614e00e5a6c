import os
from runpy import run_path

from setuptools import setup


def get_version():
    """
    Get the version of the version as determined by
    :py:`_mimeb64._version`.
    """
    version_path = os.path.join(os.path.dirname(__file__), "src/_mimeb64/_version.py")
    context = run_path(version_path)
    return context["__version__"]


setup(
    version=get_version(),
)
