from mockworks.file_sender.models import Credential, Document, File, SendResult
from mockworks.file_sender.sender import FileSender, build_file_sender

__all__ = ["Credential", "Document", "File", "FileSender", "SendResult", "build_file_sender"]
