"""Command-line interface for bcff"""
import sys
import argparse
import logging
import os
import time
import imageio.v3 as iio
from .dds import BlockDecompressor
from .errors import DecodeError
from .passes import PASSES


def main(argv=None):
    """Command-line interface for bcff"""
    parser = argparse.ArgumentParser(
        description='Decode BC4/BC5 DDS textures to RGB images',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bcff normal.dds                          # Rebuild normal Z, write normal.tif
  bcff normal.dds -o normal.png            # Write PNG instead
  bcff mask.dds -p void -o mask.png        # Red/green only, blue = 0
  bcff texture.dds --info                  # Display DDS file info
        """
    )

    parser.add_argument('input', help='Input DDS file path')
    parser.add_argument('-o', '--output',
                        help='Output image file path (default: input with .tif extension)')
    parser.add_argument('-p', '--pass', dest='pass_name', choices=sorted(PASSES), default='normal',
                        help='Composite pass applied to the decoded channels (default: normal)')
    parser.add_argument('--info', action='store_true', help='Only display DDS file info')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        with BlockDecompressor.open(args.input) as bcff:
            print(bcff)
            if args.info:
                return 0

            output_file = args.output or os.path.splitext(args.input)[0] + '.tif'
            print(f"\nDecoding with {args.pass_name} pass...")

            start_decompress = time.perf_counter()
            image_array = bcff.decode(PASSES[args.pass_name])
            decompress_time = time.perf_counter() - start_decompress
    except FileNotFoundError:
        print(f"Error: File '{args.input}' not found")
        return 1
    except DecodeError as e:
        print(f"Error decoding DDS file: {e}")
        return 1
    except OSError as e:
        print(f"Error reading '{args.input}': {e}")
        return 1

    try:
        start_save = time.perf_counter()
        iio.imwrite(output_file, image_array)
        save_time = time.perf_counter() - start_save
    except OSError as e:
        print(f"Error writing image: {e}")
        return 1

    print(f"Saved to: {output_file}")
    print(f"Image size: {image_array.shape[1]}x{image_array.shape[0]}")
    print(f"Decompression time: {decompress_time*1000:.2f} ms")
    print(f"Save time: {save_time*1000:.2f} ms")

    return 0


if __name__ == "__main__":
    sys.exit(main())
