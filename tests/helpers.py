from django.contrib.messages import get_messages


def message_texts(response) -> list[str]:
    return [str(m) for m in get_messages(response.wsgi_request)]
