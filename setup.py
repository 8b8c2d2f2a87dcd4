"""
Packaging script for PyPI.
"""
import setuptools
from pathlib import Path

try:
	from boozetools.macroparse.runtime import make_tables
except ImportError:
	pass
else:
	make_tables(Path(__file__).parent / "reflect" / "Reflect.md")

setuptools.setup(
	name='ctor-reflect',
	author='Beth Kjos',
	author_email='kjosib@gmail.com',
	version='0.1.0',
	packages=['reflect', ],
	package_data={
		'reflect': ["Reflect.md", "Reflect.automaton"],
	},
	install_requires=[
		'booze-tools>=0.6.2.1',
	],
	entry_points={
		'console_scripts': ["reflect = reflect.cmdline:main"],
	},
	license='MIT',
	description='Build registered Python objects from nested constructor expressions, and call their members by name',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Libraries",
		"Topic :: Software Development :: Interpreters",
	],
	python_requires='>=3.9',
)
