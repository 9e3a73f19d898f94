import os
from jinja2 import Environment, PackageLoader, select_autoescape

env = Environment(
    loader=PackageLoader("recipe_ssg", os.path.join("static_site", "templates")),
    autoescape=select_autoescape(["html", "xml"]),
)

index_template = env.get_template("index.html")
recipe_template = env.get_template("recipe.html")
