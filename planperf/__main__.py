from planperf import evaluate


if __name__ == "__main__":
    evaluate.main()
