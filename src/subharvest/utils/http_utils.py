from ..config import USER_AGENTS
import random
import requests


def get_session_with_proxy(self):
    session = requests.Session()
    session.headers.update({'User-Agent': random.choice(USER_AGENTS)})

    proxy_url = random.choice(self.proxies)
    if proxy_url:
        session.proxies = {'http': proxy_url, 'https': proxy_url}

    return session
