import os

from setuptools import setup

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def read(fname):
    return open(os.path.join(ROOT_DIR, fname)).read()


with open(os.path.join(ROOT_DIR, 'requirements.txt')) as reqs:
    requirements = [line.strip().split("==")[0] for line in reqs.readlines()
                    if line.strip()]

setup(
    name="taskdist",
    version="0.1",
    author="Taskdist team",
    description="Greedy distribution of prioritized tasks among employees",
    license="MIT",
    keywords="scheduling, task distribution, workload balancing",
    packages=["taskdist",
              "taskdist.common",
              "taskdist.distributors",
              "taskdist.serialization"],
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    long_description=read('README.md'),
)
