from setuptools import setup, find_packages
from src import tsp

MAJOR_VERSION = '0'
MINOR_VERSION = '1'
MICRO_VERSION = '0'
VERSION = '{}.{}.{}'.format(MAJOR_VERSION, MINOR_VERSION, MICRO_VERSION)

setup(
    name='tsp',
    version=VERSION,
    description='Fuzzy tmux session launcher and browser.',
    long_description=tsp.__doc__,
    author=tsp.__author__,
    author_email=tsp.__email__,
    license=tsp.__license__,
    url='http://github.com/rafi/tsp',
    keywords='tmux fzf session launcher zoxide fd',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    install_requires=['PyYAML'],
    extras_require={'test': ['pytest', 'mock']},
    python_requires='>=3.6',
    platforms='any',
    zip_safe=False,
    entry_points={
        'console_scripts': ['tsp = tsp.cli:main']
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: MIT License',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: System Administrators',
        'Operating System :: MacOS :: MacOS X',
        'Operating System :: Unix',
        'Operating System :: POSIX',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Terminals :: Terminal Emulators/X Terminals',
        'Topic :: Utilities'
    ]
)
