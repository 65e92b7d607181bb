import filetype
import posixpath
from PIL import Image
from io import BytesIO
from urllib.parse import urlsplit
import xml.etree.ElementTree as ET


def extension_from_url(url):
    path = urlsplit(url).path
    extension = posixpath.splitext(path)[1]
    return extension[1:].lower()


def detect_extension_from_bytes(byte_data):
    if is_svg(byte_data):
        return "svg"
    fileinfo = filetype.guess(byte_data)
    if fileinfo is None or not fileinfo.mime.startswith("image/"):
        raise ValueError("Cannot determine image type")

    return fileinfo.extension


def detect_dims_from_bytes(byte_data):
    if is_svg(byte_data):
        return svg_dims(byte_data)

    with Image.open(BytesIO(byte_data)) as image:
        return image.size


def is_svg(byte_data):
    return "<svg" in str(byte_data[0:100])


def svg_dims(byte_data):

    try:
        svg_string = byte_data.decode("utf-8")
        root = ET.fromstring(svg_string)

        width = root.attrib.get("width")
        height = root.attrib.get("height")

        width = int(round(float(width))) if width is not None else None
        height = int(round(float(height))) if height is not None else None

        return width, height
    except (ET.ParseError, ValueError) as e:
        # Handle parsing errors or invalid float conversion
        raise ValueError("Invalid SVG byte data or attributes.") from e


def content_type_from_extension(extension):
    if extension == "svg":
        return "image/svg+xml"
    if extension == "jpg":
        return "image/jpeg"
    return f"image/{extension}"
