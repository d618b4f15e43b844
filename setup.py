from setuptools import setup, find_packages
import os
import re


def read_version():
    '''Read the version without importing bmfont (numpy may be missing)'''
    app_path = os.path.dirname(os.path.realpath(__file__))
    with open(os.path.join(app_path, 'bmfont', '__init__.py')) as f:
        return re.search(r'__version__ = "(.+)"', f.read()).group(1)


setup(
    name="bmfont",
    version=read_version(),
    packages=find_packages(exclude=['bmfont.tests', 'bmfont.tests.*']),
    author="realitix",
    author_email="realitix@gmail.com",
    description="BMFont: binary bitmap font decoder",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    install_requires=['docopt', 'numpy', 'path'],
    extras_require={'test': ['pytest']},
    include_package_data=True,
    entry_points={'console_scripts': ['bmfont=bmfont.cli:main']},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3",
        'Programming Language :: Python :: Implementation :: CPython',
        "Topic :: Multimedia :: Graphics"
    ],
    license="Apache 2.0"
)
