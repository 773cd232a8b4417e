# -*- coding: utf-8 -*-
"""
Setup for pendelaar
"""


from setuptools import setup, find_packages

with open('README.rst', 'r', encoding='utf8') as f:
    long_description = f.read()
    
    
setup(name='pendelaar',
      version='0.1.0',
      description='Package for filtering commute journeys from NS travel invoices',
      long_description=long_description,
      long_description_content_type="text/x-rst",
      author='Pendelaar developers',
      package_dir = {'pendelaar':'pendelaar'},
      packages = find_packages(exclude=['*.tests', '*.tests.*']),
      package_data={
          'pendelaar': [
              'resources/stations.json',
              'resources/config/*.ini'
              ]
          },
      python_requires='>=3.8',
      install_requires=['pandas', 'pdfplumber>=0.11', 'pdfminer.six', 'tqdm'],
      extras_require={'test': ['pytest']},
      entry_points={
          'console_scripts': [
              'pendelaar=pendelaar.scripts.commutefilter:main'
              ]
          },
      include_package_data=True,
      zip_safe=False)
