from .cli import CLI


if __name__ == '__main__':
    cli = CLI()
    cli.run()
