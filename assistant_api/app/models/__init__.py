from assistant_api.app.models.user import User
from assistant_api.app.models.document import Document
