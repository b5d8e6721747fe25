from .connector import Connector
from .file import File
from .local_connector import LocalConnector
from .s3_connector import S3Connector
