from setuptools import setup, find_packages

setup(name='posemath',
      version='1.0.0',
      description='Value types and pure functions for 3D orientations and rigid poses',
      packages=find_packages(include=['posemath', 'posemath.*']),
      python_requires='>=3.11',
      install_requires=['numpy>=1.24'],
      extras_require={'test': ['pytest>=7']})
