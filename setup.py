import setuptools
from setuptools import setup

setup(
	name='gtfsbbox',
	version='0.0.0',
	description='Tool for computing the bounding box of GTFS shapes in OSM bbox format.',
	license='GNU GPLv3',
	packages=setuptools.find_namespace_packages(include=['gtfsbbox', 'gtfsbbox.*']),
	package_data={'gtfsbbox': ['logging_config.yaml']},
	install_requires=[
		'numpy',
		'tqdm',
		'pyyaml',
		'geojson',
	],
	extras_require={
		'test': [
			'pytest',
			'pytest-mock',
		],
	},
	entry_points={
		'console_scripts': [
			'gtfs-bbox = gtfsbbox.find_bbox:main',
		],
	},
	python_requires='>=3.10'
)
