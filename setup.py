import setuptools
from setuptools.errors import BaseError
from dollarcents import VERSION


with open("README.md", "r") as fh:
    long_description = fh.read()


class CleanCommand(setuptools.Command):
    """Custom clean command to tidy up the project root."""
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        import shutil
        dirs = [
            'build',
            'dist',
            'dollarcents.egg-info',
        ]
        for tree in dirs:
            shutil.rmtree(tree, ignore_errors=True)
        import os
        from glob import glob
        globs = ('**/*.pyc', '**/*.tgz', '**/*.pyo')
        for g in globs:
            for file in glob(g, recursive=True):
                try:
                    os.remove(file)
                except OSError:
                    print(f"Error while deleting file: {file}")


class BlockReleaseCommand(setuptools.Command):
    """Raises an error if VERSION is already present on PyPI."""
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        from outdated import check_outdated
        try:
            stale, latest = check_outdated('dollarcents', VERSION)
            raise BaseError(
                'Please update VERSION in __init__. '
                f'Current {VERSION} PyPI latest {latest}')
        except ValueError:
            pass


setuptools.setup(
    name="dollarcents",
    version=VERSION,
    description=("An exact dollar amount type backed by an integer count of "
                 "cents, with strict parsing of \"$12.34\" style strings"),
    keywords='dollars cents money currency parse format',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    python_requires='>=3.10',
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Office/Business :: Financial",
    ],
    install_requires=[
        'mock',
        'outdated',
        'progress',
    ],
    entry_points=dict(
        console_scripts=[
            'dollarcents-cli=dollarcents.cli:main',
        ],
    ),
    cmdclass={
        'clean': CleanCommand,
        'block_on_version': BlockReleaseCommand,
    },
)
