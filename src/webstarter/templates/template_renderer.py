"""Render the Jinja2 file templates that ship beside each scaffolder."""

import importlib.resources

import jinja2


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Render a template from the ``templates`` subpackage of *package*.

    Args:
        template_name: Template filename (e.g. "webpack.config.js.j2")
        package: The caller's package (pass __package__).
        **kwargs: Template variables.

    Raises:
        FileNotFoundError: If the template does not exist.
    """
    templates = importlib.resources.files(f"{package}.templates")
    source = templates.joinpath(template_name).read_text(encoding="utf-8")
    return jinja2.Template(source, keep_trailing_newline=True).render(**kwargs)


def write_template(path: str, template_name: str, *, package: str, **kwargs) -> str:
    """Render a template and write it to *path*. Returns the path written."""
    content = render_template(template_name, package=package, **kwargs)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    return path
