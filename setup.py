"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='abacus-calculator',
	version='0.1.0',
	packages=['abacus', ],
	entry_points={
		'console_scripts': ["abacus = abacus.cmdline:main"],
	},
	license='MIT',
	description='An interactive command-line calculator with variables and builtin functions',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: End Users/Desktop",
		"Intended Audience :: Education",
		"Topic :: Scientific/Engineering :: Mathematics",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
