from vale_frontmatter.cli import main

if __name__ == "__main__":
    main()
