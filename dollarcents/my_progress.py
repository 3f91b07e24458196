from progress.bar import IncrementalBar


class NoProgress:
    def next(self, i=1):
        pass

    def finish(self):
        pass


def no_progress_factory(*args, **kwargs):
    return NoProgress()


def determinate_progress_cli(msg, max):
    return IncrementalBar(msg, max=max)