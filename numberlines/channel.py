def ignore(data):
    """Useful placeholder for a connection that only sends"""
    pass


class Channel(object):
    """
    A channel connects any number of receivers; each connection returns a `send` function which delivers data to all
    _other_ receivers. Not sending data back to its sender is what keeps a party from reacting to its own messages.

    >>> from numberlines.channel import Channel
    >>> c = Channel()
    >>> def overview(data):
    ...     print("OVERVIEW RECEIVED", data)
    ...
    >>> def detail(data):
    ...     print("DETAIL RECEIVED", data)
    ...
    >>> send_overview = c.connect(overview)
    >>> send_detail = c.connect(detail)
    >>> send_overview("zoom")
    DETAIL RECEIVED zoom
    >>> send_detail("pan")
    OVERVIEW RECEIVED pan

    A broadcast, on the other hand, reaches everybody:
    >>> c.broadcast("reset")
    OVERVIEW RECEIVED reset
    DETAIL RECEIVED reset

    Disconnected receivers receive nothing anymore:
    >>> c.disconnect(overview)
    >>> c.broadcast("reset")
    DETAIL RECEIVED reset
    """

    def __init__(self):
        self.receivers = []

    def connect(self, receiver):
        # receiver :: function that takes data
        self.receivers.append(receiver)

        def send(data):
            # iterate over a copy: receivers may (dis)connect while receiving
            for r in list(self.receivers):
                if r is not receiver:
                    r(data)

        return send

    def disconnect(self, receiver):
        self.receivers.remove(receiver)

    def broadcast(self, data):
        for r in list(self.receivers):
            r(data)
