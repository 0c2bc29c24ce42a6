from navigator import run_navigator
import sys

if __name__ == '__main__':
    sys.exit(run_navigator(sys.argv[1:]))
