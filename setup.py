from setuptools import setup, find_packages

setup(
    name="recipe_ssg",
    version="1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"recipe_ssg": ["static_site/templates/*"]},
    description="A static site generator for collections of Markdown recipes.",
    install_requires=["jinja2"],
    extras_require={"test": ["pytest", "lxml"]},
    entry_points={
        "console_scripts": [
            "recipe-ssg=recipe_ssg.scripts.recipe_ssg:main",
            "recipe-ssg-site=recipe_ssg.scripts.recipe_ssg_site:main",
        ],
    },
)
