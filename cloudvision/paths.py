"""Helpers to build and parse resource names.

```python
>>> product_path("my-project", "us-west1", "shoe-1")
'projects/my-project/locations/us-west1/products/shoe-1'
>>> match_product_path("projects/my-project/locations/us-west1/products/shoe-1")["product"]
'shoe-1'
```
"""

import re

from cloudvision.exceptions import ResourceNameError


class PathTemplate:
    """A resource name template such as `projects/{project}/locations/{location}`."""

    _VARIABLE = re.compile(r"\{(\w+)\}")

    def __init__(self, template: str):
        self.template = template
        self.variables = self._VARIABLE.findall(template)
        parts = self._VARIABLE.split(template)
        # split() alternates literal text and variable names
        pattern = "".join(
            re.escape(part) if index % 2 == 0 else f"(?P<{part}>[^/]+)"
            for index, part in enumerate(parts)
        )
        self._regex = re.compile(f"^{pattern}$")

    def __repr__(self) -> str:
        return f"PathTemplate({self.template!r})"

    def render(self, **values: str) -> str:
        missing = [name for name in self.variables if name not in values]
        if missing:
            raise ValueError(f"Missing values {missing} for template '{self.template}'")
        for name in self.variables:
            value = str(values[name])
            if not value or "/" in value:
                raise ValueError(f"Invalid value {value!r} for '{name}' in '{self.template}'")
        return self._VARIABLE.sub(lambda m: str(values[m.group(1)]), self.template)

    def match(self, path: str) -> dict[str, str]:
        found = self._regex.match(path)
        if found is None:
            raise ResourceNameError(path, self.template)
        return found.groupdict()


LOCATION = PathTemplate("projects/{project}/locations/{location}")
PRODUCT_SET = PathTemplate("projects/{project}/locations/{location}/productSets/{product_set}")
PRODUCT = PathTemplate("projects/{project}/locations/{location}/products/{product}")
REFERENCE_IMAGE = PathTemplate(
    "projects/{project}/locations/{location}/products/{product}/referenceImages/{reference_image}"
)


def location_path(project: str, location: str) -> str:
    return LOCATION.render(project=project, location=location)


def product_set_path(project: str, location: str, product_set: str) -> str:
    return PRODUCT_SET.render(project=project, location=location, product_set=product_set)


def product_path(project: str, location: str, product: str) -> str:
    return PRODUCT.render(project=project, location=location, product=product)


def reference_image_path(project: str, location: str, product: str, reference_image: str) -> str:
    return REFERENCE_IMAGE.render(
        project=project, location=location, product=product, reference_image=reference_image
    )


def match_location_path(name: str) -> dict[str, str]:
    return LOCATION.match(name)


def match_product_set_path(name: str) -> dict[str, str]:
    return PRODUCT_SET.match(name)


def match_product_path(name: str) -> dict[str, str]:
    return PRODUCT.match(name)


def match_reference_image_path(name: str) -> dict[str, str]:
    return REFERENCE_IMAGE.match(name)
