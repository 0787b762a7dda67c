from setuptools import setup, find_packages


setup(name='vecmat',
      version='1.0.0',
      description='Immutable vector, matrix, and quaternion value types with euler angle rotation conversions',
      packages=find_packages(include=['vecmat', 'vecmat.*']),
      python_requires='>=3.11',
      install_requires=['numpy'],
      extras_require={'test': ['pytest', 'scipy']})
