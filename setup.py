"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='sysdc',
	version='0.1.0',
	packages=['sysdc', "sysdc.static", ],
	entry_points={
		'console_scripts': ["sysdc = sysdc.cmdline:main"],
	},
	license='MIT',
	description='Parser, name resolver, and type-match checker for the SysDC system-description language',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Compilers",
		"Topic :: Software Development :: Documentation",
		"Environment :: Console",
    ],
	python_requires='>=3.11',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
