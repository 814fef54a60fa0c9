# tests/core/conftest.py
import pytest

UIAUTOMATOR_XML = """<?xml version='1.0' encoding='UTF-8' standalone='yes' ?>
<hierarchy rotation="0">
  <node index="0" text="" resource-id="" class="android.widget.FrameLayout" content-desc="">
    <node index="0" text="Login" resource-id="com.app:id/login" class="android.widget.Button" content-desc="Login" />
    <node index="1" text="Forgot?" class="android.widget.TextView" content-desc="" />
  </node>
</hierarchy>
"""


@pytest.fixture
def uiautomator_xml():
    """Een kleine uiautomator dump met een frame, een knop en een tekst."""
    return UIAUTOMATOR_XML
