from setuptools import setup

setup(
	name="EZRange",
	version="1.0",
	packages=["ezrange"],
	python_requires=">=3.8",
	install_requires=[
		"numpy",
		"sortedcontainers",
	],
	extras_require={
		"test": ["pytest"],
	},
)
