from grpt.rpc.client import RpcClient, ServiceInfo, TranscodingRpcTransport

__all__ = [
    "RpcClient",
    "ServiceInfo",
    "TranscodingRpcTransport",
]
