from .transport import AiohttpTransport, create_client_session  # noqa
