"""
Protocol buffer modules for the demo services.

Message classes and service stubs are compiled from the .proto files shipped
in demo_app/protos when this module is first imported, so no generated code
lives in the repository. grpc resolves proto paths against sys.path, so the
directory holding the demo_app package is put on it first; this keeps the
import working from any working directory, installed or editable.
"""

import sys
from importlib import resources

import grpc

PROTO_ROOT = str(resources.files("demo_app").parent)
if PROTO_ROOT not in sys.path:
    sys.path.append(PROTO_ROOT)

HELLO_PROTO = "demo_app/protos/hello.proto"
SUM_PROTO = "demo_app/protos/sum.proto"

hello_pb2, hello_pb2_grpc = grpc.protos_and_services(HELLO_PROTO)
sum_pb2, sum_pb2_grpc = grpc.protos_and_services(SUM_PROTO)

# Fully-qualified service names, as used by the health service.
HELLO_SERVICE_NAME = hello_pb2.DESCRIPTOR.services_by_name["Hello"].full_name
SUM_SERVICE_NAME = sum_pb2.DESCRIPTOR.services_by_name["SumService"].full_name

__all__ = [
    "HELLO_SERVICE_NAME",
    "PROTO_ROOT",
    "SUM_SERVICE_NAME",
    "hello_pb2",
    "hello_pb2_grpc",
    "sum_pb2",
    "sum_pb2_grpc",
]
