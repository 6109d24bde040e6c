"""ML-SUBSET

:author: Sebastian Flennerhag
:copyright: 2017-2018
:license: MIT

ML-Subset - lazy data subsetting, partitioning and resampling
"""

import os
import re

from setuptools import setup, find_packages


def get_version():
    """Read the version without importing the package and its dependencies."""
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                        'mlsubset', '__init__.py')
    with open(path) as f:
        return re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                         f.read(), re.M).group(1)


VERSION = get_version()

setup(name='mlsubset',
      version=VERSION,
      description='Lazy data subsetting, partitioning and resampling',
      author='Sebastian Flennerhag',
      author_email='sebastianflennerhag@hotmail.com',
      packages=find_packages(),
      include_package_data=True,
      install_requires=['numpy>=1.17',
                        'scipy>=0.17'],
      extras_require={'test': ['pytest']},
      python_requires='>=3.6',
      license='MIT',
      platforms='any',
      classifiers=['License :: OSI Approved :: MIT License',
                   'Development Status :: 4 - Beta',
                   'Operating System :: Microsoft :: Windows',
                   'Operating System :: POSIX',
                   'Operating System :: Unix',
                   'Operating System :: MacOS',
                   'Programming Language :: Python :: 3',
                   'Topic :: Scientific/Engineering',
                   'Topic :: Scientific/Engineering :: Artificial Intelligence'
                   ],
      long_description="""
Lazy subsets, views and resampling strategies for machine learning data

Data containers (numpy arrays, scipy sparse matrices, lists and any object
implementing the container protocol) are subset, split into training and
validation folds, batched, windowed and resampled without copying data
until observations are requested.

Contact
=======
For questions and comments reach out to sebastianflennerhag@hotmail.com.
""")
