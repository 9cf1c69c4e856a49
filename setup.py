# -*- coding: utf-8 -*-
#
#    InfuraLib - Python Infura API Client Library
#    PyPi Setup Tool
#    © 2024 - 1200 Web Development <http://1200wd.com/>
#
#    This program is free software: you can redistribute it and/or modify
#    it under the terms of the GNU Affero General Public License as
#    published by the Free Software Foundation, either version 3 of the
#    License, or (at your option) any later version.
#
#    This program is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#    GNU Affero General Public License for more details.
#
#    You should have received a copy of the GNU Affero General Public License
#    along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

from setuptools import setup
from codecs import open
import os

here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'infuralib', 'config', 'VERSION'), encoding='utf-8') as f:
    version = f.read().strip()

# Get the long description from the relevant file
readmetxt = ''
if os.path.exists(os.path.join(here, 'README.rst')):
    with open(os.path.join(here, 'README.rst'), encoding='utf-8') as f:
        readmetxt = f.read()

kwargs = {}


install_requires = [
      'requests>=2.25.0',
]

kwargs['install_requires'] = install_requires
kwargs['extras_require'] = {
      'test': ['pytest>=7.0'],
}

setup(
      name='infuralib',
      version=version,
      description='Python client for the Infura blockchain API',
      long_description=readmetxt,
      classifiers=[
            'Development Status :: 4 - Beta',
            'Intended Audience :: Developers',
            'Intended Audience :: Financial and Insurance Industry',
            'License :: OSI Approved :: GNU Affero General Public License v3 or later (AGPLv3+)',
            'Natural Language :: English',
            'Operating System :: OS Independent',
            'Programming Language :: Python :: 3.8',
            'Programming Language :: Python :: 3.9',
            'Programming Language :: Python :: 3.10',
            'Programming Language :: Python :: 3.11',
            'Programming Language :: Python :: 3.12',
            'Topic :: Software Development :: Libraries :: Python Modules',
            'Topic :: Internet :: WWW/HTTP',
      ],
      url='http://github.com/1200wd/infuralib',
      author='1200wd',
      author_email='info@1200wd.com',
      license='GNU3',
      packages=['infuralib', 'infuralib.config', 'infuralib.services', 'infuralib.tools'],
      package_data={'infuralib': ['config/VERSION', 'data/*.ini']},
      entry_points={
          'console_scripts': ['infura-cli=infuralib.tools.cli:main']
      },
      test_suite='tests',
      include_package_data=True,
      keywords='infura ethereum json-rpc api client ticker blacklist',
      zip_safe=False,
      **kwargs
)
