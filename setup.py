import codecs
import os
import re
import setuptools


here = os.path.abspath(os.path.dirname(__file__))


def read(*parts):
    # intentionally *not* adding an encoding option to open, See:
    #   https://github.com/pypa/virtualenv/issues/201#issuecomment-3145690
    with codecs.open(os.path.join(here, *parts), 'r') as fp:
        return fp.read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


setuptools.setup(
    name='enclose',
    version=find_version('src/enclose', '__init__.py'),
    author="Thomas Zamojski",
    author_email="thomas.zamojski@datastorm.fr",
    packages=['enclose', 'enclose.core'],
    package_dir={'': 'src'},
    license='LICENSE.txt',
    description="Minimum enclosing disc and convex hull of planar points.",
    long_description=read('README'),
    python_requires=">=3.8",
    install_requires=[
        "numpy >= 1.20",
        "pandas >= 1.3",
        "shapely >= 2.0",
        "toolz >= 0.7.4",
    ],
    extras_require={
        "test": ["pytest >= 6.0"],
    },
    entry_points='''
        '''
)
