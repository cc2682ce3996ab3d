from setuptools import setup, find_packages

long_description=\
"""=================================================
 LitSMT: Litmus tests for SMT-based checkers
=================================================

LitSMT translates concurrency litmus tests into self-contained
records for SMT-based memory model checkers.

Record contents
===============
* Test architecture, name and header information
* Symbolic values and per-thread register initialization
* Per-thread assembly listings
* Final state assertion as an SMT-LIB S-expression
* Expected solver result (sat/unsat)

Supported Input Formats
=======================
* herd style litmus tests (*.litmus)

LitSMT relies on pyparsing for reading litmus tests and on PySMT
(http://www.pysmt.org) for SMT-LIB symbol handling.
"""

setup(name='LitSMT',
      version='0.1.0',
      description='Litmus tests for SMT-based checkers',
      long_description=long_description,
      license='BSD',
      packages = find_packages(exclude=["tests"]),
      include_package_data = True,
      install_requires=["pyparsing>=3.0","pysmt"],
      extras_require={
          'test': ["pytest"],
      },
      entry_points={
          'console_scripts': [
              'LitSMT = litsmt.shell:main'
          ],
      },
      zip_safe=True)
