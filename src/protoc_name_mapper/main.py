from __future__ import annotations

import sys

from protoc_name_mapper.parser.descriptor_transform import DescriptorError
from protoc_name_mapper.plugin import PluginError, run


def main():
    """protoc entry point: request on stdin, response on stdout."""
    data = sys.stdin.buffer.read()
    try:
        output = run(data)
    except (PluginError, DescriptorError) as e:
        print(f"FATAL: {e}", file=sys.stderr)
        sys.exit(1)

    sys.stdout.buffer.write(output)
    sys.stdout.buffer.flush()


if __name__ == "__main__":
    main()
