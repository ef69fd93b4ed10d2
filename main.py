import argparse
import logging
import sys

from portfolio.app import create_app
from portfolio.config import load_settings
from portfolio.errors import PortfolioError
from portfolio.generator import SiteGenerator
from portfolio.logger import setup_logger
from portfolio.navigator import CorpusNavigator


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Personal portfolio site with a Markdown blog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Serve the site (port from APP_PORT, default 8081)
  python main.py --serve

  # Write a static copy of the site to docs/
  python main.py --build --output docs

  # List posts in navigation order
  python main.py --list
        """
    )

    parser.add_argument('--config', '-c', type=str,
                        help='JSON config file overriding the environment')
    parser.add_argument('--serve', '-s', action='store_true',
                        help='Run the web server (default action)')
    parser.add_argument('--host', type=str, default='0.0.0.0',
                        help='Address to listen on')
    parser.add_argument('--port', '-p', type=int,
                        help='Port to listen on (overrides APP_PORT)')
    parser.add_argument('--build', action='store_true',
                        help='Write the site as static HTML')
    parser.add_argument('--output', '-o', type=str, default='docs',
                        help='Output directory for --build')
    parser.add_argument('--list', '-l', action='store_true',
                        help='List post identifiers in navigation order')
    parser.add_argument('--debug', action='store_true',
                        help='Verbose logging and Flask debug mode')

    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(str(e), file=sys.stderr)
        return 1

    logger = setup_logger(settings.log_file)
    if args.debug:
        logger.setLevel(logging.DEBUG)

    if args.list:
        navigator = CorpusNavigator(settings.content_dir, sort=settings.sort_posts)
        try:
            identifiers = navigator.identifiers()
        except OSError as e:
            logger.error(f"❌ Could not list {settings.content_dir}: {e}")
            return 1
        print(f"\n📋 Posts in {settings.content_dir}:")
        for i, identifier in enumerate(identifiers, 1):
            print(f"  {i}. {identifier}")
        return 0

    if args.build:
        try:
            SiteGenerator(settings, args.output).generate()
        except (PortfolioError, OSError) as e:
            logger.error(f"❌ Build failed: {e}")
            return 1
        return 0

    port = args.port or settings.port
    logger.info(f"🌐 Server running on port :{port}")
    create_app(settings).run(host=args.host, port=port, debug=args.debug)
    return 0


if __name__ == "__main__":
    sys.exit(main())
