from billiards_admin.clients.pos_client import PosApiClient

__all__ = ["PosApiClient"]
