import asyncio


def test_timer_fires(report):
    loop = asyncio.get_running_loop()
    started = loop.time()

    def check():
        report(loop.time() - started >= 0.05)

    loop.call_later(0.05, check)


def test_task_result(report):
    async def compute():
        await asyncio.sleep(0)
        return sum(range(10))

    task = asyncio.ensure_future(compute())
    task.add_done_callback(lambda done: report(done.result() == 45))


def test_forgets_outcome(report):
    report()


TESTS = {
    "timer_fires": test_timer_fires,
    "task_result": test_task_result,
    "forgets_outcome": test_forgets_outcome,
}
