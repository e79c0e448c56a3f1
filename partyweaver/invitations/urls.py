SEND_INVITATION_URL = "/api/v1/invitations/send"
