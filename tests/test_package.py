import objpermute
import pkgutil
import pytest

packages = [name for ff, name, is_pkg in pkgutil.walk_packages(objpermute.__path__)]


@pytest.mark.parametrize("package", packages)
def test_package(package):
    __import__("objpermute.%s" % package)
