import argparse
import json
import sys
from typing import List, Optional
from specparse.ReadConfig import ReadConfig as rc
from specparse.devices.blkio import validate_bps_device, validate_iops_device, validate_weight_device
from specparse.devices.device_spec import parse_device
from specparse.namespaces.classifier import classify_namespace
from specparse.namespaces.modes import namespace_mode
from specparse.singleton import Singleton
from specparse.errors import SpecError
from logpkg.log_kcld import LogKCld, log_to_file

logger = LogKCld()

KINDS = ("weight-device", "bps-device", "iops-device", "device", "namespace")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Validate container resource and namespace specifiers')
    parser.add_argument('--configDir', type=str, help='Please specify ConfigDir')
    sub = parser.add_subparsers(dest='command', required=True)

    check = sub.add_parser('check', help='validate specifiers and print them as JSON')
    check.add_argument('kind', choices=KINDS)
    check.add_argument('values', nargs='+')
    check.add_argument('--ns-kind', default='net', help='namespace kind for "namespace" checks')

    serve = sub.add_parser('serve', help='run the validation API')
    serve.add_argument('--host', default='0.0.0.0')
    serve.add_argument('--port', type=int, default=8000)
    return parser


def _check_one(kind: str, value: str, ns_kind: str) -> dict:
    if kind == 'weight-device':
        return validate_weight_device(value).model_dump()
    if kind == 'bps-device':
        return validate_bps_device(value).model_dump()
    if kind == 'iops-device':
        return validate_iops_device(value).model_dump()
    if kind == 'device':
        return parse_device(value).model_dump()
    return classify_namespace(value, namespace_mode(ns_kind, value)).model_dump(mode='json')


@log_to_file(logger)
def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.configDir:
        # validators read the config per call
        Singleton.clear(rc)
        rc(args.configDir)

    if args.command == 'serve':
        import uvicorn
        from server.main_api import app
        uvicorn.run(app, host=args.host, port=args.port)
        return 0

    status = 0
    for value in args.values:
        try:
            print(json.dumps(_check_one(args.kind, value, args.ns_kind)))
        except SpecError as e:
            print(f"{e.kind}: {e}", file=sys.stderr)
            status = 1
    return status


if __name__ == '__main__':
    sys.exit(main())
