import sys
from setuptools import setup, find_packages

if sys.version_info < (3,9):
    print("numrepr requires Python 3.9 or later", file=sys.stderr)
    sys.exit(1)

with open("README.md") as f:
    long_desc = f.read()


setup (name = 'numrepr',
       version = '0.1',
       description = "Plain text and LaTeX representations of numbers "
                     "with a fixed number of significant digits",
       long_description =  long_desc,
       long_description_content_type = 'text/markdown',

       package_dir = {'': 'src'},
       packages = find_packages('src'),
       zip_safe = False,
       install_requires = [
            'attrs',
            'numpy',
            'pandas',
            'pyyaml',
       ],
       extras_require = {
            'test': ['pytest', 'hypothesis'],
       },
       entry_points = {
            'console_scripts': ['numrepr = numrepr.app:main'],
       },
       classifiers=[
            'License :: OSI Approved :: BSD License',
            'Operating System :: OS Independent',
            'Programming Language :: Python',
            'Topic :: Scientific/Engineering',
            'Topic :: Text Processing :: Markup :: LaTeX',
            'Programming Language :: Python :: 3',
            ],
       )
