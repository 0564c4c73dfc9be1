"""polyarith setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import polyarith

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='polyarith',
    version=polyarith.__version__,
    description='polyarith -- Polynomial arithmetic over the integers and GF(2)',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['polynomial', 'polynomial arithmetic', 'GF(2)', 'binary field',
              'irreducible polynomial', 'primitive polynomial', 'LFSR'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=polyarith.__license__,
    packages=['polyarith'],
    platforms=['any'],
    install_requires=['gmpy2'],
    python_requires='>=3.8'
)
