import argparse
from thumbor_bridge.core.exceptions import InvalidSource
from thumbor_bridge.core.logger import configure_logging
from thumbor_bridge.core.settings import get_settings
from thumbor_bridge.models.image_metadata import Asset
from thumbor_bridge.services.thumbor_service import ThumborService

ASSET_ID = "cli"


def render(service: ThumborService, image_url: str, width=None, height=None):
    service.provider.register(
        ASSET_ID, Asset(url=image_url, width=width, height=height)
    )
    lines = []
    for name in service.registry:
        image = service.downsize(ASSET_ID, name)
        if image is None:
            continue
        lines.append(
            f"{name}\t{image.width or 0}x{image.height or 0}\t{image.url}"
        )
    return lines


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Print the Thumbor URL of every image size for one image"
    )
    parser.add_argument("image_url")
    parser.add_argument("--width", type=int, help="original image width")
    parser.add_argument("--height", type=int, help="original image height")
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    service = ThumborService(settings)
    try:
        # Fail early rather than print nothing for every size
        service.get_image(args.image_url)
    except InvalidSource as e:
        parser.error(str(e))

    for line in render(service, args.image_url, args.width, args.height):
        print(line)


if __name__ == "__main__":
    main()
